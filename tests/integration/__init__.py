"""Integration tests for the Tumblr API client.

Test Structure:
- test_client_flow.py: Every accessor end to end over a mock transport
"""
