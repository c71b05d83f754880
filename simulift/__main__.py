from simulift.cli import main

raise SystemExit(main())
