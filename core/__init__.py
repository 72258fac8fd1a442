"""Core Deck Jockey modules"""
