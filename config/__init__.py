"""Configuration package for Deck Jockey"""
