from ttycolors.cli import main

raise SystemExit(main())
