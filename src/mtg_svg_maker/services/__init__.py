"""Rendering services shared by the card layers."""
