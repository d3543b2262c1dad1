from fastapi import APIRouter

router = APIRouter()


@router.get("/")
def root():
    return {"message": "Page metadata service is running"}
