INDEX_HTML = r"""<!doctype html>
<html lang="en" data-bs-theme="dark">
<head>
  <meta charset="utf-8">
  <title>{{ app_title }}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css" rel="stylesheet">
  <style>
    .card { border: 1px solid rgba(255,255,255,.08); }
    .title { white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }
    .path { color: rgba(255,255,255,.6); }
    code.path { word-break: break-all; }
  </style>
</head>
<body>
<nav class="navbar navbar-expand-lg bg-body-tertiary px-3">
  <a class="navbar-brand" href="{{ url_for('gameshelf.index') }}">{{ app_title }}</a>
</nav>

<div class="container py-4">
  {% with messages = get_flashed_messages() %}
    {% if messages %}
      <div class="alert alert-warning">{{ messages|join('. ') }}</div>
    {% endif %}
  {% endwith %}

  <div class="card mb-4">
    <div class="card-body">
      <form class="row g-2" method="post" action="{{ url_for('gameshelf.add_game') }}">
        <div class="col-md-4"><input class="form-control" name="name" placeholder="Name" required></div>
        <div class="col-md-6"><input class="form-control" name="exe_path" placeholder="Path to executable" required></div>
        <div class="col-md-2"><button class="btn btn-primary w-100" type="submit">Add</button></div>
      </form>
    </div>
  </div>

  <form class="d-flex gap-3 align-items-center small mb-3" method="post" action="{{ url_for('gameshelf.settings_post') }}">
    <div class="form-check">
      <input class="form-check-input" type="checkbox" id="show_paths" name="show_paths" value="1" {% if settings.show_paths %}checked{% endif %}>
      <label class="form-check-label" for="show_paths">Show paths</label>
    </div>
    <div class="form-check">
      <input class="form-check-input" type="checkbox" id="confirm_delete" name="confirm_delete" value="1" {% if settings.confirm_delete %}checked{% endif %}>
      <label class="form-check-label" for="confirm_delete">Confirm deletes</label>
    </div>
    <button class="btn btn-outline-light btn-sm" type="submit">Save settings</button>
  </form>

  {% if not games %}
    <div class="text-center py-5">
      <h4>No games yet.</h4>
      <p class="text-secondary">Add a name and the path to its executable above.</p>
    </div>
  {% else %}
  <ul class="list-group">
    {% for g in games %}
      <li class="list-group-item d-flex align-items-center gap-3">
        <span class="badge text-bg-secondary">{{ g.id }}</span>
        <div class="flex-grow-1">
          <div class="title fw-semibold" title="{{ g.name }}">{{ g.name }}</div>
          {% if show_paths %}<code class="small path">{{ g.exe_path }}</code>{% endif %}
        </div>
        <form method="post" action="{{ url_for('gameshelf.run_game', game_id=g.id) }}">
          <button class="btn btn-success btn-sm" type="submit">Run</button>
        </form>
        <form method="post" action="{{ url_for('gameshelf.delete_game', game_id=g.id) }}"
              {% if settings.confirm_delete %}onsubmit="return confirm('Delete this game?');"{% endif %}>
          <button class="btn btn-outline-danger btn-sm" type="submit">Delete</button>
        </form>
      </li>
    {% endfor %}
  </ul>
  {% endif %}
</div>
</body>
</html>
"""
