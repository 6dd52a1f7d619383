from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from flask_cors import CORS

cors = CORS()

db = SQLAlchemy()
migrate = Migrate()

# reads the (optional) bearer token that identifies the acting user
jwt = JWTManager()
