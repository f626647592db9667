import os
from dotenv import load_dotenv

load_dotenv()

class Config:
  """
    Configuration class for the application.
    Values are read from the environment (and a .env file, if present) once, at import time.
  """

  FLASK_APP = os.getenv("FLASK_APP", "app.py")
  FLASK_RUN_PORT = int(os.getenv("FLASK_RUN_PORT", 5000))
  FLASK_DEBUG = os.getenv("FLASK_DEBUG", "True").lower() == "true"
  LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

  # "memory" keeps everything in-process; "chroma" persists to CHROMA_PERSISTENCE_DIR
  DOCUMENT_STORE_BACKEND = os.getenv("DOCUMENT_STORE_BACKEND", "memory").lower()
  CHROMA_PERSISTENCE_DIR = os.getenv("CHROMA_PERSISTENCE_DIR", "./data/chroma_db")
  CHROMA_COLLECTION_PREFIX = os.getenv("CHROMA_COLLECTION_PREFIX", "gameatlas")
  SEED_GAMES_PATH = os.getenv("SEED_GAMES_PATH")

  MATCH_GENRE_WEIGHT = int(os.getenv("MATCH_GENRE_WEIGHT", 3))
  MATCH_TAG_WEIGHT = int(os.getenv("MATCH_TAG_WEIGHT", 2))
  MATCH_PLATFORM_WEIGHT = int(os.getenv("MATCH_PLATFORM_WEIGHT", 1))
  MATCH_MIN_SCORE = int(os.getenv("MATCH_MIN_SCORE", 0))
  MATCH_TOP_N = int(os.getenv("MATCH_TOP_N", 10))
  MATCH_CANDIDATE_POOL = int(os.getenv("MATCH_CANDIDATE_POOL", 100))
