from html2pdf.cli.main import main

raise SystemExit(main())
