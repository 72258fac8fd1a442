"""
OAuth callback server for Deck Jockey
GET /login redirects to Spotify, GET /callback receives the code
"""

import threading

from flask import Flask, redirect, request
from werkzeug.serving import make_server

from config.settings import CALLBACK_HOST, CALLBACK_PORT
from core.errors import AuthError


def create_auth_app(token_manager):
    """
    Build the Flask app for the Spotify authorization flow

    Args:
        token_manager: TokenManager that performs the code exchange
    """
    app = Flask(__name__)

    @app.route("/login")
    def login():
        return redirect(token_manager.authorize_url())

    @app.route("/callback")
    def callback():
        error = request.args.get("error")
        if error:
            print(f"✗ Spotify authorization denied: {error}")
            return f"Authorization failed: {error}", 400

        code = request.args.get("code")
        if not code:
            return "Missing authorization code", 400

        try:
            token_manager.exchange_code(code)
        except AuthError as e:
            print(f"✗ {e}")
            return "Token exchange failed - check the console", 502

        return "Deck Jockey is connected to Spotify. You can close this tab."

    return app


class AuthServer:
    """Runs the callback app on the fixed local port in a background thread"""

    def __init__(self, token_manager, host=CALLBACK_HOST, port=CALLBACK_PORT):
        self.host = host
        self.port = port
        self.app = create_auth_app(token_manager)
        self.server = None
        self.thread = None

    def start(self):
        self.server = make_server(self.host, self.port, self.app, threaded=True)
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.thread.start()
        print(f"✓ Spotify login available at http://{self.host}:{self.port}/login")

    def stop(self):
        if self.server:
            self.server.shutdown()
            self.server = None
        if self.thread:
            self.thread.join(timeout=1.0)
            self.thread = None
