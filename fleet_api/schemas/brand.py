from pydantic import BaseModel


class BrandIn(BaseModel):
    name: str
    country: str


class BrandOut(BaseModel):
    id: int
    name: str
    country: str

    class Config:
        from_attributes = True
