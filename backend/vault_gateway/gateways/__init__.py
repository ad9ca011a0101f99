from vault_gateway.gateways.transform import TransformGateway
from vault_gateway.gateways.transit import TransitGateway

__all__ = ["TransformGateway", "TransitGateway"]
