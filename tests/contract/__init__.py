"""Contract tests for Tumblr API response shapes.

Test files:
- test_posts_api.py: Blog info, posts, likes and tagged responses
"""
