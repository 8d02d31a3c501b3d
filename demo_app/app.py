#!/usr/bin/env python3
"""
Demo Web Application - Table Browser

A small web front end that drives RowDB's command API, the same one
the interactive shell uses.

Features:
- Create, select and list tables
- Edit cells by reference (e.g. Name3) and append rows
- Load and save .odt files in the demo data directory
- View the current table as the ASCII grid

Run:
    pip install flask
    python app.py

Then visit: http://localhost:5000
"""

import os
import sys

from flask import Flask, jsonify, render_template_string, request

# Add parent directory to path to import rowdb
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rowdb import DatabaseManager
from rowdb.core.errors import ErrorKind


DATA_DIR = os.path.join(os.path.dirname(__file__), 'table_data')

INDEX_TEMPLATE = """<!doctype html>
<html>
<head><title>{{ name }}</title></head>
<body>
  <h1>{{ name }}{% if current %} / {{ current }}{% endif %}</h1>
  <h2>Tables</h2>
  {% if tables %}
  <ul>
    {% for table in tables %}<li>{{ table }}</li>{% endfor %}
  </ul>
  {% else %}
  <p>No tables loaded.</p>
  {% endif %}
  {% if grid %}<pre>{{ grid }}</pre>{% endif %}
</body>
</html>
"""


def _respond(result):
    """Turn a CommandResult into a JSON response."""
    if result.ok:
        status = 200
    elif result.kind == ErrorKind.NOT_FOUND:
        status = 404
    else:
        status = 400
    return jsonify(result.to_dict()), status


def _payload():
    return request.get_json(silent=True) or {}


def _rejected(message):
    return jsonify({'ok': False, 'message': message, 'kind': None, 'output': ''}), 400


def _inside_data_dir(path, data_dir):
    """True when a client path is relative and resolves under data_dir."""
    if not path or os.path.isabs(path) or path.startswith('~'):
        return False
    base = os.path.realpath(data_dir or os.getcwd())
    target = os.path.realpath(os.path.join(base, path))
    return os.path.commonpath([base, target]) == base and target != base


def create_app(manager=None):
    """Build the Flask app around a DatabaseManager."""
    app = Flask(__name__)
    app.config['MANAGER'] = manager or DatabaseManager(DATA_DIR)

    def db():
        return app.config['MANAGER']

    @app.route('/')
    def index():
        """Current table and the list of loaded tables."""
        view = db().view()
        return render_template_string(
            INDEX_TEMPLATE,
            name="RowDB",
            current=db().current_table_name,
            tables=db().list_tables(),
            grid=view.output if view.ok else "",
        )

    @app.route('/api/tables', methods=['GET'])
    def list_tables():
        return jsonify({
            'tables': db().list_tables(),
            'current': db().current_table_name or None,
        })

    @app.route('/api/tables', methods=['POST'])
    def create_table():
        data = _payload()
        name = str(data.get('name', '')).strip()
        columns = [str(col).strip() for col in data.get('columns', []) if str(col).strip()]

        if not name or not columns:
            return _rejected('Table name and at least one column required.')

        return _respond(db().create(name, columns))

    @app.route('/api/select/<name>', methods=['POST'])
    def select_table(name):
        return _respond(db().select(name))

    @app.route('/api/view')
    def view_table():
        return _respond(db().view())

    @app.route('/api/edit', methods=['POST'])
    def edit_cell():
        data = _payload()
        return _respond(db().edit(str(data.get('ref', '')), str(data.get('value', ''))))

    @app.route('/api/rows', methods=['POST'])
    def add_row():
        values = [str(value) for value in _payload().get('values', [])]
        return _respond(db().add_row(values))

    def data_path():
        """Client path from the payload, or None if it leaves the data directory."""
        path = str(_payload().get('path', '')).strip()
        return path if _inside_data_dir(path, db().data_dir) else None

    @app.route('/api/load', methods=['POST'])
    def load_table():
        path = data_path()
        if path is None:
            return _rejected('Path must be a file inside the data directory.')
        return _respond(db().load(path))

    @app.route('/api/save', methods=['POST'])
    def save_table():
        path = data_path()
        if path is None:
            return _rejected('Path must be a file inside the data directory.')
        return _respond(db().save(path))

    return app


app = create_app()


if __name__ == '__main__':
    os.makedirs(DATA_DIR, exist_ok=True)

    print("\n" + "="*60)
    print("RowDB Demo - Table Browser")
    print("="*60)
    print(f"\nData directory: {DATA_DIR}")
    print("Starting server at http://localhost:5000")
    print("\nPress Ctrl+C to stop the server.\n")

    app.run(debug=True, host='127.0.0.1', port=5000)
