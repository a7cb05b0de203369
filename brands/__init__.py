"""
Brands app: brand entity, repository port and Django ORM adapter.
"""
