"""
Interviews Domain

Interview scheduling through LINE commands and the due-reminder sweep.
"""
