"""
Student Council API — Services Layer
======================================

What:  Business logic between routes (HTTP) and the in-memory store.
How:   Services receive the store as an argument on every call, so they hold
       no request state and can be unit-tested with a fresh InMemoryStore.

Service Inventory:
    - CredentialIssuer (abstract) / DemoCredentialIssuer: bearer tokens
    - AuthService: password and provider login
    - MeetingService: meetings and minutes
    - AnnouncementService: announcements
    - UploadService: upload filtering and disk storage
    - PdfRenderer (abstract) / PlaceholderPdfRenderer: document generation seam
    - DashboardService: stats and leaderboard derived views
"""
