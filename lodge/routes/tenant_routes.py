from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from lodge.database import get_db
from lodge.services.tenant_service import TenantService
from lodge.schemas.common import MessageResponse
from lodge.schemas.tenant_schemas import TenantCreate, TenantResponse, TenantUpdate

router = APIRouter()


@router.get("", response_model=list[TenantResponse])
def list_tenants(db: Session = Depends(get_db)):
    """List all tenants with their rooms, newest first"""
    return TenantService(db).list_tenants()


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
def create_tenant(data: TenantCreate, db: Session = Depends(get_db)):
    """
    Create a tenant.

    - Every required field and format (phone, Aadhar, pincode) is validated
    - Returns 400 if the room doesn't exist, 409 on duplicate tenant
    """
    return TenantService(db).create_tenant(data)


@router.get("/{tenant_id}", response_model=TenantResponse)
def get_tenant(tenant_id: int, db: Session = Depends(get_db)):
    """Get a tenant with its room"""
    return TenantService(db).get_tenant(tenant_id)


@router.patch("/{tenant_id}", response_model=TenantResponse)
def update_tenant(tenant_id: int, data: TenantUpdate, db: Session = Depends(get_db)):
    """
    Update a tenant.

    - All required fields must be resupplied (full replace)
    - Returns 404 if the tenant doesn't exist, 409 on duplicate tenant
    """
    return TenantService(db).update_tenant(tenant_id, data)


@router.delete("/{tenant_id}", response_model=MessageResponse)
def delete_tenant(tenant_id: int, db: Session = Depends(get_db)):
    """Delete a tenant"""
    TenantService(db).delete_tenant(tenant_id)
    return MessageResponse(message="Tenant deleted successfully")
