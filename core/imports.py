from flask import Flask, request, jsonify, Blueprint, current_app
from flask_jwt_extended import create_access_token, get_jwt_identity, jwt_required, JWTManager, get_jwt
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_bcrypt import Bcrypt
from flasgger import Swagger
from flask_cors import CORS
from datetime import datetime, timedelta
from functools import wraps
from enum import Enum
import secrets
import string
import os
import logging
from dotenv import load_dotenv
