"""Immutable value objects, their builders and validity predicates."""
from lattice.models.access_check import (
    AccessCheck,
    AccessCheckBuilder,
    is_valid_access_check,
    is_valid_access_check_array,
)
from lattice.models.ace import Ace, AceBuilder, is_valid_ace, is_valid_ace_array
from lattice.models.acl import Acl, AclBuilder, AclData, AclDataBuilder, is_valid_acl, is_valid_acl_data
from lattice.models.fqn import FullyQualifiedName, is_valid_fqn
from lattice.models.grant import Grant, GrantBuilder, is_valid_grant, is_valid_grant_array
from lattice.models.organization import Organization, OrganizationBuilder, is_valid_organization
from lattice.models.principal import Principal, PrincipalBuilder, is_valid_principal, is_valid_principal_array
from lattice.models.template import Model, ModelBuilder, is_valid_model

__all__ = [
    "AccessCheck",
    "AccessCheckBuilder",
    "Ace",
    "AceBuilder",
    "Acl",
    "AclBuilder",
    "AclData",
    "AclDataBuilder",
    "FullyQualifiedName",
    "Grant",
    "GrantBuilder",
    "Model",
    "ModelBuilder",
    "Organization",
    "OrganizationBuilder",
    "Principal",
    "PrincipalBuilder",
    "is_valid_access_check",
    "is_valid_access_check_array",
    "is_valid_ace",
    "is_valid_ace_array",
    "is_valid_acl",
    "is_valid_acl_data",
    "is_valid_fqn",
    "is_valid_grant",
    "is_valid_grant_array",
    "is_valid_model",
    "is_valid_organization",
    "is_valid_principal",
    "is_valid_principal_array",
]
