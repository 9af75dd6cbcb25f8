"""
Superheroes Web API
===================
FastAPI-based REST API over the hero dataset.

Quick Start:
    uvicorn superheroes.web_api.main:app --reload
"""
from .main import app, create_app

__all__ = ["app", "create_app"]
