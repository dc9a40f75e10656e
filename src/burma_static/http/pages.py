"""Built-in HTML documents.

The 404 page is fixed: it is embedded here and not configurable.
"""

NOT_FOUND_HTML = """
<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>404</title>
    <style>
      main {
        position: absolute;
        top: 50%;
        left: 50%;
        transform: translate(-50%, -50%);
        color: #888;
        text-align: center;
      }
      a {
        text-decoration: none;
        padding: 7px;
        border: 1px solid #888;
        color: #888;
      }
    </style>
  </head>
  <body>
    <main>
      <h1>404 Not Found</h1>
      <br />
      <a href="/">Home</a>
    </main>
  </body>
</html>

"""
