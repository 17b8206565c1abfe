from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional
from listings_api.dependencies.store import get_store
from listings_api.schemas.property import ErrorResponse, MessageResponse, PropertyCreate, PropertyResponse
from listings_api.services.properties import create_property, delete_property, list_properties, missing_required_fields
from listings_api.stores.base import PropertyStore
from structlog import get_logger

logger = get_logger()
router = APIRouter(prefix="/api/properties", tags=["properties"])

MISSING_FIELDS_ERROR = "Missing required property fields."

@router.get("", response_model=List[PropertyResponse], responses={500: {"model": ErrorResponse}})
async def list_properties_endpoint(store: PropertyStore = Depends(get_store)):
    """
    Every listing in the collection, in store iteration order.
    """
    logger.info("GET /api/properties request received")
    try:
        properties = await list_properties(store)
    except Exception as e:
        logger.error("Error fetching properties", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to fetch properties from the database.")
    logger.info("Fetched properties", total_properties=len(properties))
    return properties

@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED, responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def create_property_endpoint(payload: Optional[PropertyCreate] = None, store: PropertyStore = Depends(get_store)):
    """
    Add a listing. ``name``, ``price`` and ``location`` are required; any other
    field is stored as sent and ``image`` defaults to a placeholder.
    """
    data = payload.model_dump(exclude_unset=True) if payload is not None else {}
    logger.info("POST /api/properties request received", body=data)
    missing = missing_required_fields(data)
    if missing:
        logger.warning("Rejected property with missing fields", missing=missing)
        raise HTTPException(status_code=400, detail=MISSING_FIELDS_ERROR)
    try:
        created = await create_property(store, data)
    except Exception as e:
        logger.error("Error adding property", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to add property to the database.")
    logger.info("Created property", property_id=created["id"])
    return created

@router.delete("/{property_id}", response_model=MessageResponse, responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def delete_property_endpoint(property_id: str, store: PropertyStore = Depends(get_store)):
    logger.info("DELETE /api/properties request received", property_id=property_id)
    try:
        deleted = await delete_property(store, property_id)
    except Exception as e:
        logger.error("Error deleting property", property_id=property_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to delete property from the database.")
    if not deleted:
        logger.info("Property not found", property_id=property_id)
        raise HTTPException(status_code=404, detail="Property not found.")
    logger.info("Deleted property", property_id=property_id)
    return {"message": "Property deleted successfully."}
