"""
IP Australia advanced trademark search scraper.
"""
