from stageforge.cli import main

main()
