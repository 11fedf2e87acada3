from inertia_rails_mcp.cli import main

main()
