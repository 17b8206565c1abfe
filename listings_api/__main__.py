import uvicorn
from listings_api.config import settings

def main():
    uvicorn.run("listings_api.main:app", host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    main()
