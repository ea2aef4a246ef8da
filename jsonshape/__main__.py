from jsonshape.cli.main import main

main()
