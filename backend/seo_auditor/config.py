"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()

@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = "SEO Checklist Auditor"
    
    # Checklist store
    CHECKLIST_PATH: str = os.getenv("CHECKLIST_PATH", "")
    CHECKLIST_FILENAME: str = os.getenv("CHECKLIST_FILENAME", "360_seo_master_checklist.json")
    
    # HTTP client settings
    HTTP_TIMEOUT: int = int(os.getenv("HTTP_TIMEOUT", "15"))
    OPTIONAL_FETCH_TIMEOUT: int = int(os.getenv("OPTIONAL_FETCH_TIMEOUT", "10"))
    HTTP_MAX_REDIRECTS: int = int(os.getenv("HTTP_MAX_REDIRECTS", "5"))
    USER_AGENT: str = os.getenv("AUDITOR_USER_AGENT", "SEOChecklistAuditor/1.0")
    
    # Remediation: when set, only files under this directory may be patched
    REMEDIATION_ROOT: str = os.getenv("REMEDIATION_ROOT", "")
    
    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"])

settings = Settings()
