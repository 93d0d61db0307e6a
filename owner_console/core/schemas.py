"""
Form payload validation
Models mirror the console forms: camelCase aliases on the wire, the same
field limits and cross-field rules, the same error messages.
"""
import re
from datetime import date, datetime
from typing import ClassVar, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

EMAIL_RE = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
URL_RE = re.compile(r'^https?://[^\s/$.?#].[^\s]*$', re.IGNORECASE)
USERNAME_RE = re.compile(r'^[a-z0-9_]+$')
STRONG_PASSWORD_RE = re.compile(r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)')
CURRENCY_RE = re.compile(r'^[A-Z]{3}$')
YEAR_RE = re.compile(r'^\d{4}$')

SKILL_CATEGORIES = (
    'Frontend',
    'Backend',
    'Database',
    'DevOps',
    'Mobile',
    'Design',
    'Tools',
    'Other',
)

GOAL_CATEGORIES = (
    'emergency_fund',
    'vacation',
    'house',
    'car',
    'education',
    'retirement',
    'debt_payoff',
    'investment',
    'other',
)

END_DATE_MESSAGE = 'End date must be after start date'
URL_MESSAGE = 'Must be a valid URL'


class PayloadValidationError(Exception):
    """Raised when a form payload fails validation

    errors maps a dotted field path (wire names) to its messages.
    """

    def __init__(self, errors, message='Validation failed'):
        super().__init__(message)
        self.message = message
        self.errors = errors


def parse_date(value):
    """Calendar date of an ISO date or datetime string

    The whole value must parse; a trailing Z is read as UTC.
    """
    text = str(value).strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    return datetime.fromisoformat(text).date()


def _validate_date(value):
    if value is None:
        return value
    try:
        parse_date(value)
    except ValueError:
        raise ValueError('Invalid date')
    return value


def _validate_url(value):
    if value is None:
        return value
    if not URL_RE.match(value):
        raise ValueError(URL_MESSAGE)
    return value


def _split_list(value):
    """Accept comma separated strings for list fields"""
    if isinstance(value, str):
        return [item.strip() for item in value.split(',') if item.strip()]
    return value


def _end_before_start(start, end):
    if not start or not end:
        return False
    return parse_date(end) < parse_date(start)


class WireModel(BaseModel):
    """camelCase on the wire; empty form inputs count as absent"""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    @field_validator('*', mode='before')
    @classmethod
    def check_blank_to_none(cls, value):
        if isinstance(value, str) and value.strip() == '':
            return None
        return value


class FormModel(WireModel):
    """Base for console form payloads

    Every field is optional at the type level so one model serves both
    create (full) and update (partial) payloads. Required fields for create
    are listed in required_fields; cross-field rules live in
    cross_field_errors.
    """

    required_fields: ClassVar[Dict[str, str]] = {}
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {}

    def cross_field_errors(self, partial=False):
        return {}

    def missing_required(self, partial=False):
        errors = {}
        data = self.model_dump(by_alias=True)
        provided = self.model_dump(by_alias=True, exclude_unset=True)
        for name, message in self.required_fields.items():
            if data.get(name) is not None:
                continue
            # Partial updates may omit a field but never clear it
            if not partial or name in provided:
                errors[name] = [message]
        return errors


def _errors_from_pydantic(model, exc):
    errors = {}
    for err in exc.errors():
        path = '.'.join(str(part) for part in err['loc']) or '_general'
        message = model.error_messages.get(path, {}).get(err['type'], err['msg'])
        if message.startswith('Value error, '):
            message = message[len('Value error, '):]
        errors.setdefault(path, []).append(message)
    return errors


def parse_payload(model, payload, partial=False):
    """Validate a payload and return the by-alias dict to forward upstream

    Raises PayloadValidationError with field errors on failure.
    """
    if not isinstance(payload, dict):
        raise PayloadValidationError({'_general': ['Request body must be a JSON object']})

    try:
        instance = model.model_validate(payload)
    except ValidationError as e:
        raise PayloadValidationError(_errors_from_pydantic(model, e))

    errors = instance.missing_required(partial)
    for path, messages in instance.cross_field_errors(partial).items():
        errors.setdefault(path, []).extend(messages)
    if errors:
        raise PayloadValidationError(errors)

    if partial:
        return instance.model_dump(by_alias=True, exclude_unset=True)
    return instance.model_dump(by_alias=True, exclude_none=True)


# Auth

class LoginInput(FormModel):
    email: Optional[str] = None
    password: Optional[str] = None

    required_fields: ClassVar[Dict[str, str]] = {
        'email': 'Please enter a valid email address',
        'password': 'Password is required',
    }

    @field_validator('email')
    @classmethod
    def check_email(cls, value):
        if value is not None and not EMAIL_RE.match(value):
            raise ValueError('Please enter a valid email address')
        return value


class RegisterInput(FormModel):
    first_name: Optional[str] = Field(None, alias='firstName', min_length=2, max_length=50)
    last_name: Optional[str] = Field(None, alias='lastName', min_length=2, max_length=50)
    username: Optional[str] = Field(None, min_length=3, max_length=30)
    email: Optional[str] = None
    password: Optional[str] = Field(None, min_length=8)

    required_fields: ClassVar[Dict[str, str]] = {
        'firstName': 'First name must be at least 2 characters',
        'lastName': 'Last name must be at least 2 characters',
        'username': 'Username must be at least 3 characters',
        'email': 'Please enter a valid email address',
        'password': 'Password must be at least 8 characters',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'firstName': {
            'string_too_short': 'First name must be at least 2 characters',
            'string_too_long': 'First name must be less than 50 characters',
        },
        'lastName': {
            'string_too_short': 'Last name must be at least 2 characters',
            'string_too_long': 'Last name must be less than 50 characters',
        },
        'username': {
            'string_too_short': 'Username must be at least 3 characters',
            'string_too_long': 'Username must be less than 30 characters',
        },
        'password': {'string_too_short': 'Password must be at least 8 characters'},
    }

    @field_validator('username')
    @classmethod
    def check_username(cls, value):
        if value is not None and not USERNAME_RE.match(value):
            raise ValueError('Username can only contain lowercase letters, numbers, and underscores')
        return value

    @field_validator('email')
    @classmethod
    def check_email(cls, value):
        if value is not None and not EMAIL_RE.match(value):
            raise ValueError('Please enter a valid email address')
        return value

    @field_validator('password')
    @classmethod
    def check_password(cls, value):
        if value is not None and len(value) >= 8 and not STRONG_PASSWORD_RE.match(value):
            raise ValueError(
                'Password must contain at least one uppercase letter, '
                'one lowercase letter, and one number'
            )
        return value


class ChangePasswordInput(FormModel):
    current_password: Optional[str] = Field(None, alias='currentPassword')
    new_password: Optional[str] = Field(None, alias='newPassword', min_length=8)

    required_fields: ClassVar[Dict[str, str]] = {
        'currentPassword': 'Current password is required',
        'newPassword': 'Password must be at least 8 characters',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'newPassword': {'string_too_short': 'Password must be at least 8 characters'},
    }

    def cross_field_errors(self, partial=False):
        if self.current_password and self.current_password == self.new_password:
            return {'newPassword': ['New password must be different from the current password']}
        return {}


class IdListInput(FormModel):
    ids: Optional[List[str]] = Field(None, min_length=1)

    required_fields: ClassVar[Dict[str, str]] = {'ids': 'At least one item must be selected'}
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'ids': {'too_short': 'At least one item must be selected'},
    }


class BulkDeleteInput(IdListInput):
    pass


class ReorderInput(IdListInput):
    """Ids in their new display order"""

    def cross_field_errors(self, partial=False):
        if self.ids and len(set(self.ids)) != len(self.ids):
            return {'ids': ['Each item can only appear once']}
        return {}


def select_filters(source, allowed, choices=None):
    """Pick the known list filters out of request args

    page and limit must be positive integers; keys listed in choices must
    hold one of the allowed values.
    """
    choices = choices or {}
    filters = {}
    errors = {}
    for key in allowed:
        value = source.get(key)
        if value is None or value == '':
            continue
        if key in ('page', 'limit'):
            try:
                value = int(value)
            except (TypeError, ValueError):
                value = 0
            if value < 1:
                errors[key] = [f'{key} must be a positive integer']
                continue
        elif key in choices and value not in choices[key]:
            errors[key] = [f"{key} must be one of: {', '.join(choices[key])}"]
            continue
        filters[key] = value
    if errors:
        raise PayloadValidationError(errors, 'Invalid filters')
    return filters


def check_date_filters(filters, keys=('startDate', 'endDate')):
    """Reject date filters that are not ISO dates"""
    errors = {}
    for key in keys:
        if key not in filters:
            continue
        try:
            parse_date(filters[key])
        except ValueError:
            errors[key] = ['Invalid date']
    if errors:
        raise PayloadValidationError(errors, 'Invalid filters')
    return filters


# Finance

class AlertThresholds(WireModel):
    warning: Optional[float] = Field(None, ge=0, le=100)
    critical: Optional[float] = Field(None, ge=0, le=100)
    exceeded: Optional[float] = Field(None, ge=0, le=100)


class BudgetInput(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category_id: Optional[str] = Field(None, alias='categoryId')
    category_type: Optional[Literal['ExpenseCategory', 'IncomeCategory']] = Field(None, alias='categoryType')
    amount: Optional[float] = Field(None, ge=0.01)
    period: Optional[Literal['monthly', 'yearly']] = None
    start_date: Optional[str] = Field(None, alias='startDate')
    end_date: Optional[str] = Field(None, alias='endDate')
    alert_thresholds: Optional[AlertThresholds] = Field(None, alias='alertThresholds')
    rollover_enabled: Optional[bool] = Field(None, alias='rolloverEnabled')
    description: Optional[str] = Field(None, max_length=500)

    required_fields: ClassVar[Dict[str, str]] = {
        'name': 'Name is required',
        'amount': 'Amount must be greater than 0',
        'period': 'Period is required',
        'startDate': 'Start date is required',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'name': {
            'string_too_short': 'Name is required',
            'string_too_long': 'Name must not exceed 100 characters',
        },
        'amount': {'greater_than_equal': 'Amount must be greater than 0'},
        'description': {'string_too_long': 'Description must not exceed 500 characters'},
    }

    @field_validator('start_date', 'end_date')
    @classmethod
    def check_dates(cls, value):
        return _validate_date(value)

    def cross_field_errors(self, partial=False):
        errors = {}
        if self.category_id and not self.category_type:
            errors['categoryType'] = ['Category type is required when category is selected']

        if _end_before_start(self.start_date, self.end_date):
            errors['endDate'] = [END_DATE_MESSAGE]

        thresholds = self.alert_thresholds
        if thresholds is not None:
            warning, critical, exceeded = thresholds.warning, thresholds.critical, thresholds.exceeded
            if warning is not None and critical is not None and warning >= critical:
                errors['alertThresholds.warning'] = ['Warning threshold must be less than critical threshold']
            elif warning is not None and critical is None and exceeded is not None and warning >= exceeded:
                errors['alertThresholds.warning'] = ['Warning threshold must be less than exceeded threshold']
            if critical is not None and exceeded is not None and critical >= exceeded:
                errors['alertThresholds.critical'] = ['Critical threshold must be less than exceeded threshold']
        return errors


class TransactionTemplateInput(WireModel):
    amount: Optional[float] = Field(None, ge=0.01)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    type: Optional[Literal['expense', 'income']] = None
    category_id: Optional[str] = Field(None, alias='categoryId')
    notes: Optional[str] = Field(None, max_length=100)
    tags: Optional[List[str]] = Field(None, max_length=10)
    payment_method: Optional[str] = Field(None, alias='paymentMethod', max_length=50)
    reference: Optional[str] = Field(None, max_length=200)

    @field_validator('tags', mode='before')
    @classmethod
    def check_tags(cls, value):
        return _split_list(value)


class RecurringTransactionInput(FormModel):
    template: Optional[TransactionTemplateInput] = None
    frequency: Optional[Literal['daily', 'weekly', 'monthly', 'yearly', 'custom']] = None
    interval: Optional[int] = Field(None, ge=1)
    start_date: Optional[str] = Field(None, alias='startDate')
    end_date: Optional[str] = Field(None, alias='endDate')
    is_active: Optional[bool] = Field(None, alias='isActive')

    required_fields: ClassVar[Dict[str, str]] = {
        'template': 'Transaction template is required',
        'frequency': 'Frequency is required',
        'startDate': 'Start date is required',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'interval': {'greater_than_equal': 'Interval must be at least 1'},
        'template.amount': {'greater_than_equal': 'Amount must be greater than 0'},
        'template.description': {
            'string_too_short': 'Description is required',
            'string_too_long': 'Description must not exceed 500 characters',
        },
        'template.notes': {'string_too_long': 'Notes must not exceed 100 characters'},
        'template.tags': {'too_long': 'Maximum 10 tags allowed'},
        'template.paymentMethod': {'string_too_long': 'Payment method must not exceed 50 characters'},
        'template.reference': {'string_too_long': 'Reference must not exceed 200 characters'},
    }

    @field_validator('start_date', 'end_date')
    @classmethod
    def check_dates(cls, value):
        return _validate_date(value)

    def cross_field_errors(self, partial=False):
        errors = {}
        if not partial and self.template is not None:
            if self.template.amount is None:
                errors['template.amount'] = ['Amount must be greater than 0']
            if self.template.description is None:
                errors['template.description'] = ['Description is required']
            if self.template.type is None:
                errors['template.type'] = ['Type is required']

        if self.frequency == 'custom' and self.interval is None:
            errors['interval'] = ['Interval is required when frequency is custom']

        if _end_before_start(self.start_date, self.end_date):
            errors['endDate'] = [END_DATE_MESSAGE]
        return errors


TRANSACTION_FIELD_MESSAGES = {
    'amount': {'greater_than_equal': 'Amount must be greater than 0'},
    'description': {
        'string_too_short': 'Description is required',
        'string_too_long': 'Description must not exceed 500 characters',
    },
    'type': {'literal_error': 'Type must be expense or income'},
    'notes': {'string_too_long': 'Notes must not exceed 100 characters'},
    'tags': {'too_long': 'Maximum 10 tags allowed'},
    'paymentMethod': {'string_too_long': 'Payment method must not exceed 50 characters'},
    'reference': {'string_too_long': 'Reference must not exceed 200 characters'},
}


class TransactionFields(FormModel):
    """Fields shared by transactions and saved transaction templates"""

    amount: Optional[float] = Field(None, ge=0.01)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    type: Optional[Literal['expense', 'income']] = None
    category_id: Optional[str] = Field(None, alias='categoryId')
    notes: Optional[str] = Field(None, max_length=100)
    tags: Optional[List[str]] = Field(None, max_length=10)
    payment_method: Optional[str] = Field(None, alias='paymentMethod', max_length=50)
    reference: Optional[str] = Field(None, max_length=200)

    error_messages: ClassVar[Dict[str, Dict[str, str]]] = TRANSACTION_FIELD_MESSAGES

    @field_validator('tags', mode='before')
    @classmethod
    def check_tags(cls, value):
        return _split_list(value)


class TransactionInput(TransactionFields):
    transaction_date: Optional[str] = Field(None, alias='date')
    currency: Optional[str] = None
    exchange_rate: Optional[float] = Field(None, alias='exchangeRate', gt=0)
    base_amount: Optional[float] = Field(None, alias='baseAmount', ge=0)
    base_currency: Optional[str] = Field(None, alias='baseCurrency')

    required_fields: ClassVar[Dict[str, str]] = {
        'amount': 'Amount must be greater than 0',
        'date': 'Date is required',
        'description': 'Description is required',
        'type': 'Type is required',
    }

    @field_validator('transaction_date')
    @classmethod
    def check_date(cls, value):
        return _validate_date(value)

    @field_validator('currency', 'base_currency')
    @classmethod
    def check_currency(cls, value):
        if value is not None and not CURRENCY_RE.match(value):
            raise ValueError('Currency must be a valid ISO 4217 code')
        return value


class SavedTransactionTemplateInput(TransactionFields):
    """Standalone template, not the one embedded in a recurring transaction"""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[str] = Field(None, max_length=50)

    required_fields: ClassVar[Dict[str, str]] = {
        'name': 'Template name is required',
        'amount': 'Amount must be greater than 0',
        'description': 'Description is required',
        'type': 'Type is required',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = dict(
        TRANSACTION_FIELD_MESSAGES,
        name={'string_too_long': 'Template name must not exceed 200 characters'},
        category={'string_too_long': 'Category must not exceed 50 characters'},
    )


class SaveAsTemplateInput(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[str] = Field(None, max_length=50)

    required_fields: ClassVar[Dict[str, str]] = {'name': 'Template name is required'}
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'name': {'string_too_long': 'Template name must not exceed 200 characters'},
        'category': {'string_too_long': 'Category must not exceed 50 characters'},
    }


class FromTemplateInput(FormModel):
    transaction_date: Optional[str] = Field(None, alias='date')

    required_fields: ClassVar[Dict[str, str]] = {'date': 'Date is required'}

    @field_validator('transaction_date')
    @classmethod
    def check_date(cls, value):
        return _validate_date(value)


class DuplicateInput(FormModel):
    """dateAdjustment shifts the copy by that many days"""

    date_adjustment: Optional[int] = Field(None, alias='dateAdjustment')


class BulkDuplicateInput(IdListInput):
    date_adjustment: Optional[int] = Field(None, alias='dateAdjustment')


class CategoryInput(FormModel):
    """Expense and income categories share one form"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    color: Optional[str] = Field(None, max_length=7)
    icon: Optional[str] = Field(None, max_length=50)
    order: Optional[int] = Field(None, ge=0)
    description: Optional[str] = Field(None, max_length=500)

    required_fields: ClassVar[Dict[str, str]] = {'name': 'Name is required'}
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'name': {'string_too_long': 'Name must be less than 100 characters'},
        'color': {'string_too_long': 'Color must be a valid hex color code'},
        'icon': {'string_too_long': 'Icon must be less than 50 characters'},
        'description': {'string_too_long': 'Description must be less than 500 characters'},
    }


class MerchantCategoryInput(FormModel):
    merchant_name: Optional[str] = Field(None, alias='merchantName', min_length=1, max_length=200)
    category_id: Optional[str] = Field(None, alias='categoryId')

    required_fields: ClassVar[Dict[str, str]] = {
        'merchantName': 'Merchant name is required',
        'categoryId': 'Category is required',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'merchantName': {'string_too_long': 'Merchant name must be less than 200 characters'},
    }


class MilestoneInput(WireModel):
    amount: Optional[float] = None
    label: Optional[str] = None
    achieved: Optional[bool] = None

    @field_validator('amount')
    @classmethod
    def check_amount(cls, value):
        if value is not None and value < 0.01:
            raise ValueError('Milestone amount must be greater than 0')
        return value

    @field_validator('label')
    @classmethod
    def check_label(cls, value):
        if value is not None and len(value) > 50:
            raise ValueError('Label must not exceed 50 characters')
        return value


class FinancialGoalInput(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    target_amount: Optional[float] = Field(None, alias='targetAmount', ge=0.01)
    current_amount: Optional[float] = Field(None, alias='currentAmount', ge=0)
    category: Optional[Literal[GOAL_CATEGORIES]] = None
    target_date: Optional[str] = Field(None, alias='targetDate')
    description: Optional[str] = Field(None, max_length=500)
    milestones: Optional[List[MilestoneInput]] = None
    achieved: Optional[bool] = None

    required_fields: ClassVar[Dict[str, str]] = {
        'name': 'Name is required',
        'targetAmount': 'Target amount must be greater than 0',
        'category': 'Category is required',
        'targetDate': 'Target date is required',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'name': {'string_too_long': 'Name must not exceed 100 characters'},
        'targetAmount': {'greater_than_equal': 'Target amount must be greater than 0'},
        'currentAmount': {'greater_than_equal': 'Current amount must be 0 or greater'},
        'category': {'literal_error': 'Invalid goal category'},
        'description': {'string_too_long': 'Description must not exceed 500 characters'},
    }

    @field_validator('target_date')
    @classmethod
    def check_target_date(cls, value):
        return _validate_date(value)

    def cross_field_errors(self, partial=False):
        errors = {}
        if (
            self.current_amount is not None
            and self.target_amount is not None
            and self.current_amount > self.target_amount
        ):
            errors['currentAmount'] = ['Current amount cannot exceed target amount']

        if self.target_date and parse_date(self.target_date) < date.today():
            errors['targetDate'] = ['Target date must be today or in the future']

        if not partial:
            for index, milestone in enumerate(self.milestones or []):
                if milestone.amount is None:
                    errors[f'milestones.{index}.amount'] = ['Milestone amount must be greater than 0']
                if milestone.label is None:
                    errors[f'milestones.{index}.label'] = ['Milestone label is required']
        return errors


class GoalAmountInput(FormModel):
    amount: Optional[float] = Field(None, ge=0.01)

    required_fields: ClassVar[Dict[str, str]] = {'amount': 'Amount must be greater than 0'}
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'amount': {'greater_than_equal': 'Amount must be greater than 0'},
    }


# Portfolio

class ProjectInput(FormModel):
    title: Optional[str] = Field(None, min_length=2)
    description: Optional[str] = None
    image: Optional[str] = None
    url: Optional[str] = None
    github_url: Optional[str] = Field(None, alias='githubUrl')
    tags: Optional[List[str]] = None
    technologies: Optional[List[str]] = None
    start_date: Optional[str] = Field(None, alias='startDate')
    end_date: Optional[str] = Field(None, alias='endDate')
    featured: Optional[bool] = None

    required_fields: ClassVar[Dict[str, str]] = {'title': 'Title must be at least 2 characters'}
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'title': {'string_too_short': 'Title must be at least 2 characters'},
    }

    @field_validator('url', 'github_url', 'image')
    @classmethod
    def check_urls(cls, value):
        return _validate_url(value)

    @field_validator('tags', 'technologies', mode='before')
    @classmethod
    def check_lists(cls, value):
        return _split_list(value)

    @field_validator('start_date', 'end_date')
    @classmethod
    def check_dates(cls, value):
        return _validate_date(value)

    def cross_field_errors(self, partial=False):
        if _end_before_start(self.start_date, self.end_date):
            return {'endDate': [END_DATE_MESSAGE]}
        return {}


class TestimonialInput(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    role: Optional[str] = Field(None, max_length=200)
    company: Optional[str] = Field(None, max_length=200)
    content: Optional[str] = Field(None, min_length=1)
    avatar: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    featured: Optional[bool] = None
    order: Optional[int] = Field(None, ge=0)

    required_fields: ClassVar[Dict[str, str]] = {
        'name': 'Name is required',
        'content': 'Content is required',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'name': {'string_too_long': 'Name must be less than 200 characters'},
        'role': {'string_too_long': 'Role must be less than 200 characters'},
        'company': {'string_too_long': 'Company must be less than 200 characters'},
        'rating': {
            'greater_than_equal': 'Rating must be between 1 and 5',
            'less_than_equal': 'Rating must be between 1 and 5',
            'int_parsing': 'Rating must be between 1 and 5',
        },
    }

    @field_validator('avatar')
    @classmethod
    def check_avatar(cls, value):
        return _validate_url(value)


class SkillInput(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[Literal[SKILL_CATEGORIES]] = None
    level: Optional[float] = Field(None, ge=0, le=100)
    icon: Optional[str] = None
    color: Optional[str] = None
    order: Optional[int] = Field(None, ge=0)

    required_fields: ClassVar[Dict[str, str]] = {
        'name': 'Name is required',
        'category': 'Category is required',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'name': {'string_too_long': 'Name must be less than 100 characters'},
        'category': {'literal_error': 'Category is required'},
        'level': {
            'greater_than_equal': 'Level must be a number between 0 and 100',
            'less_than_equal': 'Level must be a number between 0 and 100',
            'float_parsing': 'Level must be a number between 0 and 100',
        },
    }


class ExperienceInput(FormModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    company_id: Optional[str] = Field(None, alias='companyId')
    company: Optional[str] = Field(None, max_length=200)
    location: Optional[str] = None
    start_date: Optional[str] = Field(None, alias='startDate')
    end_date: Optional[str] = Field(None, alias='endDate')
    current: Optional[bool] = None
    description: Optional[str] = None
    achievements: Optional[List[str]] = None
    technologies: Optional[List[str]] = None

    required_fields: ClassVar[Dict[str, str]] = {
        'title': 'Title is required',
        'startDate': 'Start date is required',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'title': {'string_too_long': 'Title must be less than 200 characters'},
        'company': {'string_too_long': 'Company must be less than 200 characters'},
    }

    @field_validator('achievements', 'technologies', mode='before')
    @classmethod
    def check_lists(cls, value):
        return _split_list(value)

    @field_validator('start_date', 'end_date')
    @classmethod
    def check_dates(cls, value):
        return _validate_date(value)

    def cross_field_errors(self, partial=False):
        errors = {}
        if _end_before_start(self.start_date, self.end_date):
            errors['endDate'] = [END_DATE_MESSAGE]
        if self.current and self.end_date:
            errors.setdefault('endDate', []).append('Current experience cannot have an end date')
        return errors


class BlogInput(FormModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200)
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = Field(None, max_length=500)
    cover_image: Optional[str] = Field(None, alias='coverImage')
    published: Optional[bool] = None
    tags: Optional[List[str]] = None

    required_fields: ClassVar[Dict[str, str]] = {
        'title': 'Title is required',
        'content': 'Content is required',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'title': {'string_too_long': 'Title must be less than 200 characters'},
        'slug': {'string_too_long': 'Slug must be less than 200 characters'},
        'excerpt': {'string_too_long': 'Excerpt must be less than 500 characters'},
    }

    @field_validator('cover_image')
    @classmethod
    def check_cover_image(cls, value):
        return _validate_url(value)

    @field_validator('tags', mode='before')
    @classmethod
    def check_tags(cls, value):
        return _split_list(value)


class CertificationInput(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    issuer: Optional[str] = Field(None, min_length=1, max_length=200)
    issue_date: Optional[str] = Field(None, alias='issueDate')
    expiry_date: Optional[str] = Field(None, alias='expiryDate')
    credential_id: Optional[str] = Field(None, alias='credentialId', max_length=100)
    credential_url: Optional[str] = Field(None, alias='credentialUrl')

    required_fields: ClassVar[Dict[str, str]] = {
        'name': 'Name is required',
        'issuer': 'Issuer is required',
        'issueDate': 'Issue date is required',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'name': {'string_too_long': 'Name must be less than 200 characters'},
        'issuer': {'string_too_long': 'Issuer must be less than 200 characters'},
        'credentialId': {'string_too_long': 'Credential ID must be less than 100 characters'},
    }

    @field_validator('issue_date', 'expiry_date')
    @classmethod
    def check_dates(cls, value):
        return _validate_date(value)

    @field_validator('credential_url')
    @classmethod
    def check_credential_url(cls, value):
        return _validate_url(value)

    def cross_field_errors(self, partial=False):
        if _end_before_start(self.issue_date, self.expiry_date):
            return {'expiryDate': ['Expiry date must be after issue date']}
        return {}


class CompanyInput(FormModel):
    name: Optional[str] = Field(None, min_length=2)
    logo: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    industry: Optional[str] = None
    location: Optional[str] = None
    founded_year: Optional[int] = Field(None, alias='foundedYear')

    required_fields: ClassVar[Dict[str, str]] = {'name': 'Name must be at least 2 characters'}
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'name': {'string_too_short': 'Name must be at least 2 characters'},
    }

    @field_validator('logo', 'website')
    @classmethod
    def check_urls(cls, value):
        return _validate_url(value)

    @field_validator('founded_year', mode='before')
    @classmethod
    def check_founded_year(cls, value):
        if value is None or str(value).strip() == '':
            return None
        if not YEAR_RE.match(str(value).strip()):
            raise ValueError('Must be a 4-digit year')
        return int(value)


class ContactInput(FormModel):
    platform: Optional[str] = Field(None, min_length=1, max_length=100)
    url: Optional[str] = None
    icon: Optional[str] = None
    order: Optional[int] = Field(None, ge=0)
    active: Optional[bool] = None

    required_fields: ClassVar[Dict[str, str]] = {
        'platform': 'Platform is required',
        'url': URL_MESSAGE,
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'platform': {'string_too_long': 'Platform must be less than 100 characters'},
    }

    @field_validator('url')
    @classmethod
    def check_url(cls, value):
        return _validate_url(value)


class EducationInput(FormModel):
    institution: Optional[str] = Field(None, min_length=1)
    degree: Optional[str] = None
    field_of_study: Optional[str] = Field(None, alias='field')
    start_date: Optional[str] = Field(None, alias='startDate')
    end_date: Optional[str] = Field(None, alias='endDate')
    gpa: Optional[str] = None
    description: Optional[str] = None

    required_fields: ClassVar[Dict[str, str]] = {
        'institution': 'Institution is required',
        'startDate': 'Start date is required',
    }

    @field_validator('gpa', mode='before')
    @classmethod
    def check_gpa(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator('start_date', 'end_date')
    @classmethod
    def check_dates(cls, value):
        return _validate_date(value)

    def cross_field_errors(self, partial=False):
        if _end_before_start(self.start_date, self.end_date):
            return {'endDate': [END_DATE_MESSAGE]}
        return {}


class PortfolioProfileInput(FormModel):
    bio: Optional[str] = Field(None, max_length=1000)
    avatar: Optional[str] = None
    resume_url: Optional[str] = Field(None, alias='resumeUrl')
    location: Optional[str] = Field(None, max_length=255)
    available_for_hire: Optional[bool] = Field(None, alias='availableForHire')
    portfolio_url: Optional[str] = Field(None, alias='portfolioUrl')
    theme: Optional[str] = Field(None, max_length=50)

    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'bio': {'string_too_long': 'Bio must be less than 1000 characters'},
        'location': {'string_too_long': 'Location must be less than 255 characters'},
        'theme': {'string_too_long': 'Theme must be less than 50 characters'},
    }

    @field_validator('avatar', 'resume_url', 'portfolio_url')
    @classmethod
    def check_urls(cls, value):
        return _validate_url(value)


# Settings

class PreferencesInput(FormModel):
    theme: Optional[Literal['light', 'dark', 'system']] = None
    language: Optional[str] = None
    date_format: Optional[str] = Field(None, alias='dateFormat')
    time_format: Optional[Literal['12h', '24h']] = Field(None, alias='timeFormat')
    timezone: Optional[str] = None
    default_dashboard_view: Optional[Literal['grid', 'list', 'table']] = Field(None, alias='defaultDashboardView')
    items_per_page: Optional[str] = Field(None, alias='itemsPerPage')
    show_widgets: Optional[bool] = Field(None, alias='showWidgets')
    editor_theme: Optional[Literal['light', 'dark', 'monokai', 'github']] = Field(None, alias='editorTheme')
    editor_font_size: Optional[int] = Field(None, alias='editorFontSize', ge=8, le=32)
    editor_line_height: Optional[float] = Field(None, alias='editorLineHeight', gt=0)
    editor_tab_size: Optional[int] = Field(None, alias='editorTabSize', ge=1, le=8)

    @field_validator('items_per_page', mode='before')
    @classmethod
    def check_items_per_page(cls, value):
        if isinstance(value, int):
            return str(value)
        return value


class ProfileInput(FormModel):
    first_name: Optional[str] = Field(None, alias='firstName', min_length=2)
    last_name: Optional[str] = Field(None, alias='lastName', min_length=2)
    display_name: Optional[str] = Field(None, alias='displayName')
    bio: Optional[str] = Field(None, max_length=500)
    location: Optional[str] = None
    website: Optional[str] = None

    required_fields: ClassVar[Dict[str, str]] = {
        'firstName': 'First name must be at least 2 characters',
        'lastName': 'Last name must be at least 2 characters',
    }
    error_messages: ClassVar[Dict[str, Dict[str, str]]] = {
        'firstName': {'string_too_short': 'First name must be at least 2 characters'},
        'lastName': {'string_too_short': 'Last name must be at least 2 characters'},
        'bio': {'string_too_long': 'Bio must be less than 500 characters'},
    }

    @field_validator('website')
    @classmethod
    def check_website(cls, value):
        if value is not None and not URL_RE.match(value):
            raise ValueError('Please enter a valid URL')
        return value


class DeleteAccountInput(FormModel):
    confirmation_token: Optional[str] = Field(None, alias='confirmationToken')

    required_fields: ClassVar[Dict[str, str]] = {
        'confirmationToken': 'Confirmation token is required',
    }
