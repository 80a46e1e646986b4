"""
PageLens: crawl a website, classify its pages and compare them with what the homepage claims.
"""
