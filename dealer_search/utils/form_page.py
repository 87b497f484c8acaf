# HTML for the single-page build form served at "/".
# {default_url} is the only placeholder.

FORM_PAGE_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Dealer Search CSV Builder</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
</head>
<body>
  <main style="max-width: 720px; margin: 40px auto; padding: 16px; font-family: sans-serif;">
    <h1>Dealer Search CSV Builder</h1>
    <form id="build-form" style="display: flex; gap: 8px; margin-top: 12px;">
      <input id="dealership-url" type="url" required value="{default_url}"
             placeholder="https://dealer-site.com"
             style="flex: 1; padding: 10px; border-radius: 6px; border: 1px solid #ccc;">
      <button id="build-button" style="padding: 10px 16px; border-radius: 6px;">Build CSV ZIP</button>
    </form>
    <p id="error" style="color: crimson; margin-top: 12px;" hidden></p>
    <p id="download" style="margin-top: 12px;" hidden>
      <a id="download-link" download="google-ads-search.zip">Download CSV ZIP</a>
    </p>
  </main>
  <script>
    const form = document.getElementById("build-form");
    const button = document.getElementById("build-button");
    const errorBox = document.getElementById("error");
    const download = document.getElementById("download");
    const link = document.getElementById("download-link");

    form.addEventListener("submit", async (e) => {{
      e.preventDefault();
      button.disabled = true;
      button.textContent = "Building…";
      errorBox.hidden = true;
      download.hidden = true;
      try {{
        const res = await fetch("/api/build", {{
          method: "POST",
          headers: {{ "Content-Type": "application/json" }},
          body: JSON.stringify({{ dealershipUrl: document.getElementById("dealership-url").value }})
        }});
        if (!res.ok) throw new Error(`Build failed: ${{res.status}}`);
        const blob = await res.blob();
        link.href = URL.createObjectURL(blob);
        download.hidden = false;
      }} catch (err) {{
        errorBox.textContent = (err && err.message) || "Unknown error";
        errorBox.hidden = false;
      }} finally {{
        button.disabled = false;
        button.textContent = "Build CSV ZIP";
      }}
    }});
  </script>
</body>
</html>
"""
