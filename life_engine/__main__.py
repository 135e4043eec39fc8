from life_engine.cli import main

raise SystemExit(main())
