from webmcp.main import main

main()
