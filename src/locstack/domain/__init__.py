"""
Domain layer - the location store and its rules, free of infrastructure concerns.
"""
