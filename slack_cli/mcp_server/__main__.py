from slack_cli.mcp_server import main

main()
