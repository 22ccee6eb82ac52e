"""View rendering module for HTML templates.

This module handles all HTML/template rendering logic, separate from API routers.
Views declare their page template, mount point and formatter; the renderer fills
the mount from the film store and hands it to the Jinja2 page template.
"""
