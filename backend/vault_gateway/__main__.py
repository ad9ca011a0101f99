from vault_gateway.server import main

main()
