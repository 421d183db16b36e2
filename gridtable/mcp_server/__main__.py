from gridtable.mcp_server import main

main()
