"""Spotify integration for Deck Jockey"""
