from pydantic import BaseModel, ConfigDict, Field

from typing import List


class UserSignup(BaseModel):
    username: str
    password: str


class UserLogin(BaseModel):
    username: str
    password: str


class UserOut(BaseModel):
    id: str
    username: str
    is_admin: bool = Field(False, alias="isAdmin")
    budget: float
    team: List[str] = []

    model_config = ConfigDict(populate_by_name=True)


class UserResponse(BaseModel):
    message: str
    user: UserOut


class PlayerStats(BaseModel):
    runs: float = 0
    wickets: float = 0
    strike_rate: float = Field(0, alias="strikeRate")
    economy: float = 0

    model_config = ConfigDict(populate_by_name=True)


class PlayerCreate(BaseModel):
    name: str
    university: str
    category: str
    stats: PlayerStats = Field(default_factory=PlayerStats)
    value: float = 0
    points: float = 0


class PlayerOut(BaseModel):
    id: str
    name: str
    university: str
    category: str
    stats: PlayerStats
    value: float
    points: float


class PlayerResponse(BaseModel):
    message: str
    player: PlayerOut
