"""Hello World: the simplest sift app.

Demonstrates the route table, path parameters, return-value
normalization, and Response chaining.

Run:
    python app.py
"""

from sift import App, Response, serve_json

app = App()


@app.route("/")
def index(request, params):
    return "Hello, World!"


@app.route("/greet/:name")
def greet(request, params):
    return f"Hello, {params['name']}!"


@app.route("/api/status")
def status(request, params):
    return serve_json({"status": "ok"})


@app.route("/custom")
def custom(request, params):
    return Response("Created").with_status(201).with_header("X-Custom", "sift")


if __name__ == "__main__":
    app.run()
