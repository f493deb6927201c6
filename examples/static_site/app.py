"""Static site: files, a directory listing, and a markdown page.

Run:
    cd examples/static_site && python app.py
"""

from pathlib import Path

from sift import App, serve_directory, serve_markdown, serve_static

HERE = Path(__file__).parent
PUBLIC = HERE / "public"

app = App(
    [
        ("/", serve_markdown(str(HERE / "README.md"))),
        ("/public", serve_directory(PUBLIC)),
        ("/public/:filename+", serve_static(PUBLIC)),
    ]
)


if __name__ == "__main__":
    app.run()
