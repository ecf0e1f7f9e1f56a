"""
Student Council API — API Routes Package
==========================================

Route Inventory:
    - health.py:        GET  /api/health
    - auth.py:          POST /api/auth/login, POST /api/auth/google
    - meetings.py:      GET/POST /api/meetings, PUT /api/meetings/{id}/archive
    - minutes.py:       GET/POST /api/minutes
    - announcements.py: GET/POST /api/announcements
    - uploads.py:       POST /api/upload, GET /uploads/{filename}
    - documents.py:     POST /api/generate-pdf
    - dashboard.py:     GET  /api/dashboard/stats, GET /api/leaderboard

Routes stay thin: extract input, run the auth/role dependencies, call a
service, return its schema. Errors are raised as CouncilError subclasses and
formatted by the handlers in main.py.
"""
