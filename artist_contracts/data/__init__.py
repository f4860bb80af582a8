"""Built-in template definitions"""
