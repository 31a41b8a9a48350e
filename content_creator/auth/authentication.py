from fastapi import HTTPException, Security, status
from fastapi.security import HTTPBearer,HTTPAuthorizationCredentials
from content_creator.utils.config import settings
security=HTTPBearer()
def verify_api_key(credentials:HTTPAuthorizationCredentials=Security(security)):
    if credentials.credentials!=settings.API_KEY:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,detail="Invalid API Key")
    return credentials.credentials
