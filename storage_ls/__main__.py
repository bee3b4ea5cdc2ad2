from storage_ls.cli import main

raise SystemExit(main())
