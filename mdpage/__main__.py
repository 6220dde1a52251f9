from mdpage.main import main

raise SystemExit(main())
