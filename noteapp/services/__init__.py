"""
Notes API — Services Layer
===========================

Service Inventory:
    - NoteService:     note CRUD
    - UserService:     registration and user listing
    - AuthService:     login and bearer-token authentication
    - PasswordHasher:  bcrypt hashing off the event loop (security.py)
    - TokenService:    JWT issue/verify (security.py)

Routes handle HTTP; services handle rules and persistence, and can be
tested with a mocked session.
"""
