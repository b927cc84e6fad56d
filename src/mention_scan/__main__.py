from mention_scan.cli import main

raise SystemExit(main())
