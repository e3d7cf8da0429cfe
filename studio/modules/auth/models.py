# Supabase Auth + session cookie
# Credential checks are delegated to Supabase Auth (auth.users table):
# - registration and password storage / hashing
# - password verification on sign-in
#
# This service issues its own session token after the provider accepts the
# credentials and keeps it in the "auth-token" cookie.

"""
Session token (HS256 JWT, see tokens.py):
- sub: users.id
- iat: issued-at (unix seconds)
- exp: iat + SESSION_TTL_DAYS (default 7 days)

Cookie "auth-token":
- HttpOnly, SameSite=Lax, Path=/
- Secure only when the request arrived over HTTPS
- Max-Age equal to the token lifetime; 0 on sign-out

No server-side session table exists, so tokens cannot be revoked before exp.
"""
