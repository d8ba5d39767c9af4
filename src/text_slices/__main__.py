from text_slices.demo import main

raise SystemExit(main())
