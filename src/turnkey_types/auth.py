"""
End-user authentication DTOs.

Email, OTP and OIDC flows all end with Turnkey encrypting a short-lived
credential bundle to ``target_public_key``.
"""

from enum import Enum
from typing import Optional

from .base import ActivityRequest, ActivityType, TurnkeyModel


class OtpType(str, Enum):
    EMAIL = "OTP_TYPE_EMAIL"
    SMS = "OTP_TYPE_SMS"


class EmailCustomizationParams(TurnkeyModel):
    app_name: Optional[str] = None
    logo_url: Optional[str] = None
    magic_link_template: Optional[str] = None
    template_variables: Optional[str] = None
    template_id: Optional[str] = None


class EmailAuthIntentV2(TurnkeyModel):
    email: str
    target_public_key: str
    api_key_name: Optional[str] = None
    expiration_seconds: Optional[str] = None
    email_customization: Optional[EmailCustomizationParams] = None
    invalidate_existing: Optional[bool] = None


class EmailAuthRequest(ActivityRequest):
    type: str = ActivityType.EMAIL_AUTH_V2.value
    parameters: EmailAuthIntentV2


class EmailAuthResult(TurnkeyModel):
    user_id: str
    api_key_id: str


class OauthIntent(TurnkeyModel):
    oidc_token: str
    target_public_key: str
    api_key_name: Optional[str] = None
    expiration_seconds: Optional[str] = None
    invalidate_existing: Optional[bool] = None


class OauthRequest(ActivityRequest):
    type: str = ActivityType.OAUTH.value
    parameters: OauthIntent


class OauthResult(TurnkeyModel):
    user_id: str
    api_key_id: str
    credential_bundle: str


class InitOtpAuthIntent(TurnkeyModel):
    otp_type: OtpType
    contact: str
    email_customization: Optional[EmailCustomizationParams] = None
    user_identifier: Optional[str] = None


class InitOtpAuthRequest(ActivityRequest):
    type: str = ActivityType.INIT_OTP_AUTH.value
    parameters: InitOtpAuthIntent


class InitOtpAuthResult(TurnkeyModel):
    otp_id: str


class OtpAuthIntent(TurnkeyModel):
    otp_id: str
    otp_code: str
    target_public_key: str
    api_key_name: Optional[str] = None
    expiration_seconds: Optional[str] = None
    invalidate_existing: Optional[bool] = None


class OtpAuthRequest(ActivityRequest):
    type: str = ActivityType.OTP_AUTH.value
    parameters: OtpAuthIntent


class OtpAuthResult(TurnkeyModel):
    user_id: str
    api_key_id: Optional[str] = None
    credential_bundle: Optional[str] = None


class InitUserEmailRecoveryIntent(TurnkeyModel):
    email: str
    target_public_key: str
    expiration_seconds: Optional[str] = None
    email_customization: Optional[EmailCustomizationParams] = None


class InitUserEmailRecoveryRequest(ActivityRequest):
    type: str = ActivityType.INIT_USER_EMAIL_RECOVERY.value
    parameters: InitUserEmailRecoveryIntent


class InitUserEmailRecoveryResult(TurnkeyModel):
    user_id: str
