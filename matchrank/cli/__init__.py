# CLI package for matchrank
"""
Command-line interface for ranking text locally.

Commands:
    matchrank score  Show how one text matches a query
    matchrank rank   Filter and sort candidates, best match first
"""
