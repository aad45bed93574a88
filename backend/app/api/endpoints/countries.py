"""
Read-only country data, proxied from restcountries.com.

These routes are public; upstream payloads pass through unchanged.
"""

from fastapi import APIRouter, Depends
from typing import Any, Dict, List

from app.schemas.common import ApiResponse
from app.services.countries_client import CountriesClient
from app.modules.auth.dependencies import get_countries_client


router = APIRouter()


@router.get("", response_model=ApiResponse[List[Dict[str, Any]]])
async def list_countries(client: CountriesClient = Depends(get_countries_client)):
    return ApiResponse[List[Dict[str, Any]]](data=await client.get_all())


@router.get("/name/{name}", response_model=ApiResponse[List[Dict[str, Any]]])
async def countries_by_name(name: str, client: CountriesClient = Depends(get_countries_client)):
    return ApiResponse[List[Dict[str, Any]]](data=await client.get_by_name(name))


@router.get("/region/{region}", response_model=ApiResponse[List[Dict[str, Any]]])
async def countries_by_region(region: str, client: CountriesClient = Depends(get_countries_client)):
    return ApiResponse[List[Dict[str, Any]]](data=await client.get_by_region(region))


@router.get("/language/{language}", response_model=ApiResponse[List[Dict[str, Any]]])
async def countries_by_language(language: str, client: CountriesClient = Depends(get_countries_client)):
    return ApiResponse[List[Dict[str, Any]]](data=await client.get_by_language(language))


@router.get("/code/{code}", response_model=ApiResponse[Dict[str, Any]])
async def country_by_code(code: str, client: CountriesClient = Depends(get_countries_client)):
    return ApiResponse[Dict[str, Any]](data=await client.get_by_code(code))
