"""Root landing page for the DNA Architect portfolio API."""

from html import escape


def render_root_page(app_name: str, storage_provider: str) -> str:
    """Return HTML for the root landing page."""
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>DNA Architect</title>
    <style>
        * {{ box-sizing: border-box; }}
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            min-height: 100vh;
            background: #0b0b0b;
            color: #ddd;
            padding: 2rem 1rem;
        }}
        .wrap {{ max-width: 560px; margin: 0 auto; }}
        h1 {{ color: #fff; font-weight: 600; letter-spacing: -0.02em; margin: 0 0 0.5rem 0; }}
        .tagline {{ color: #888; margin: 0 0 2rem 0; }}
        .card {{
            background: #111;
            border: 1px solid #1e1e1e;
            padding: 1.5rem 1.75rem;
            margin-bottom: 1.25rem;
        }}
        .card h2 {{
            font-size: 0.75rem;
            text-transform: uppercase;
            letter-spacing: 0.08em;
            color: #666;
            margin: 0 0 1rem 0;
        }}
        code {{ font-family: ui-monospace, monospace; color: #bbb; }}
        ul {{ padding-left: 1.1rem; margin: 0; line-height: 1.8; }}
        a {{ color: #e0e0e0; }}
        .foot {{ text-align: center; margin-top: 2.5rem; color: #555; font-size: 0.8125rem; }}
    </style>
</head>
<body>
    <div class="wrap">
        <h1>DNA Architect</h1>
        <p class="tagline">Architecture portfolio API: projects, renders, models and walkthroughs.</p>

        <section class="card">
            <h2>Endpoints</h2>
            <ul>
                <li><code>GET /api/v1/projects</code> gallery</li>
                <li><code>GET /api/v1/projects/{{id}}</code> project details</li>
                <li><code>POST /api/v1/projects</code> multipart upload</li>
                <li><code>DELETE /api/v1/projects/{{id}}</code></li>
                <li><code>GET /api/v1/health</code></li>
            </ul>
        </section>

        <section class="card">
            <h2>Storage</h2>
            <p>Assets are stored with the <code>{escape(storage_provider)}</code> provider.</p>
            <p><a href="/docs">Open API docs (Swagger)</a> &middot; <a href="/redoc">ReDoc</a></p>
        </section>

        <footer class="foot">{escape(app_name)} &middot; API at <code>/api/v1</code></footer>
    </div>
</body>
</html>
""".strip()
