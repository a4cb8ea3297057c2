from horsetrack.main import main

raise SystemExit(main())
