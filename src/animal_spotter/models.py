"""
TypedDict models for requests and responses to/from the Animal Spotter API.

Includes:
- Credentials: body of POST /users/signup and /users/login
- Bearer: login response, holds the session token
- AnimalSummary: one entry of GET /animals/all
- AnimalDetail: record from GET /animals/{name}

Images from GET <imageURL> are returned as Pillow images, not modelled here.
"""

from __future__ import annotations
from typing import TypedDict, List, Optional

# POST /users/signup, /users/login
class Credentials(TypedDict):
    username: str
    password: str

# POST /users/login (response)
class Bearer(TypedDict):
    token: str

# GET /animals/all (items)
AnimalSummary = str
AnimalNames = List[AnimalSummary]

# GET /animals/{name}
class AnimalDetail(TypedDict, total=False):
    id: int
    name: str
    latitude: float
    longitude: float
    timeSeen: Optional[int]   # epoch seconds
    description: str
    imageURL: str
