"""Database Infrastructure — async session factory and SQLAlchemy Base."""
