# /run.py
# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

# Now, import the app factory
from family_emr import create_app  # noqa: E402

# Create the app instance
app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=app.config['PORT'])
