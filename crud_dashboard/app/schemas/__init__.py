"""
Pydantic schema definitions for API payloads.

Each domain (users, posts) defines its own models for request and
response bodies; ``envelope`` holds the success and error wrappers
shared by all endpoints.
"""
