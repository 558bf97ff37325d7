from tick_split.cli import main

raise SystemExit(main())
