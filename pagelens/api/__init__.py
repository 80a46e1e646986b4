"""
pagelens/api package marker.
"""
