"""
API Routers - HTTP endpoint handlers

- movies: list, get, create, update and delete movie records
"""
