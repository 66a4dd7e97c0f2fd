# wsgi.py
from dotenv import load_dotenv
load_dotenv()  # loads .env before config

from bizops import create_app  # noqa: E402
app = create_app()
