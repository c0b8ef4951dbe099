"""Persistence infrastructure backed by SQLModel."""
