from prettycli.mcp_server import main

main()
