"""
# Function tools shared by &systemkit packages.
"""
