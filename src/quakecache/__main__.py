from quakecache.cli import main

raise SystemExit(main())
