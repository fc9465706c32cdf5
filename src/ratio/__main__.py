from ratio.cli import main

raise SystemExit(main())
