"""Input checks and normalization for Standard Query data.

Provides column presence checks, output-mode checks, date parsing and the
label helpers shared by every analytic.
"""
