from minify_html_literals.cli import main

main()
