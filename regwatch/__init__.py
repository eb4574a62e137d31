"""
RegWatch dashboard package: compliance risk report, updates feed and
knowledge base, with AI-driven refresh.

Exports:
  regwatch_bp   Flask blueprint (register with app.register_blueprint)
  RecordStore   in-memory state container handed to create_app()
"""
from regwatch.data import RecordStore
from regwatch.routes import regwatch_bp

__all__ = ["regwatch_bp", "RecordStore"]
