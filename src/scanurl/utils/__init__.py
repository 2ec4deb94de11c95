"""src/scanurl/utils/__init__.py"""
