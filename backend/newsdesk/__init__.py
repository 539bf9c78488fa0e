"""
Newsdesk: news record service
"""
