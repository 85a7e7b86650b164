from claude_setup.main import cli_main

cli_main()
