from aareguru_mcp.server import main

main()
