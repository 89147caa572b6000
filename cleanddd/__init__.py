"""
Clean DDD community site: knowledge catalog, events and frameworks showcase.
"""
