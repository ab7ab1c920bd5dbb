from openingstats.cli import main

raise SystemExit(main())
