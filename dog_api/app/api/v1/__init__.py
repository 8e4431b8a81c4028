"""
Version 1 of the API.

Resources are mounted at ``/dogs``, ``/breeds``, ``/adoption``,
``/health`` and ``/training`` without a version prefix.
"""
