"""
In-process usage analytics for discovery requests.
"""
