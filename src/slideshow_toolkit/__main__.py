from slideshow_toolkit.cli import main

raise SystemExit(main())
