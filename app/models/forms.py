"""Form-related Pydantic models"""
from pydantic import BaseModel, Field
from typing import List, Optional

CAPTCHA_FIELD = "captcha"


class FormField(BaseModel):
    """A single input rendered on a lead form"""
    name: str
    label: str
    input_type: str = Field("text", pattern="^(text|tel|email|url|number|select)$")
    required: bool = True
    placeholder: str = ""
    options: List[str] = []


class FormDefinition(BaseModel):
    """Static description of a lead form: its fields and where it posts"""
    key: str
    title: str
    subtitle: str
    success_message: str
    submit_label: str
    url_setting: str
    fields: List[FormField]

    @property
    def field_names(self) -> List[str]:
        return [field.name for field in self.fields]


_CAPTCHA = FormField(
    name=CAPTCHA_FIELD,
    label="Security Check: What is 2 + 2?",
    input_type="number",
    placeholder="Enter your answer",
)

BUSINESS_FORM = FormDefinition(
    key="business",
    title="Business Inquiry",
    subtitle="Tell us about your business needs",
    success_message="Thank you! We'll contact you soon.",
    submit_label="Submit Inquiry",
    url_setting="business_form_url",
    fields=[
        FormField(name="name", label="Name", placeholder="Enter the Name"),
        FormField(name="phone", label="Phone (WhatsApp)", input_type="tel",
                  placeholder="Enter the WhatsApp"),
        FormField(name="email", label="Email", input_type="email", placeholder="Enter the Email"),
        FormField(
            name="businessType",
            label="Business Type",
            input_type="select",
            placeholder="Select business type",
            options=["Web Dev", "App Dev", "E-commerce", "SaaS", "AI/ML", "Other"],
        ),
        FormField(
            name="packageInterested",
            label="Package Interested",
            input_type="select",
            placeholder="Select a package",
            options=["Starter", "Professional", "Business", "Enterprise"],
        ),
        _CAPTCHA,
    ],
)

CONTACT_FORM = FormDefinition(
    key="contact",
    title="Contact Us",
    subtitle="Get in touch with our team for your next project",
    success_message="Message sent successfully! We'll contact you soon.",
    submit_label="Send Message",
    url_setting="contact_form_url",
    fields=[
        FormField(name="name", label="Name", placeholder="Enter the Name"),
        FormField(name="email", label="Email", input_type="email", placeholder="Enter the Email"),
        FormField(name="phone", label="Phone (WhatsApp enabled)", input_type="tel",
                  placeholder="Enter the Phone no which has WhatsApp account"),
        FormField(name="companyName", label="Company Name", placeholder="Enter the Company Name"),
        FormField(name="website", label="Website (optional)", input_type="url", required=False,
                  placeholder="Enter your website URL"),
        FormField(
            name="serviceCategory",
            label="Service Category",
            input_type="select",
            placeholder="Select the service",
            options=["Marketing", "AI Automation", "Web/App Dev", "Blockchain", "Custom"],
        ),
        FormField(
            name="packageTier",
            label="Package Tier",
            input_type="select",
            placeholder="Select a package",
            options=["Basic", "Growth", "Scale", "Enterprise"],
        ),
        FormField(name="budgetRange", label="Budget Range", placeholder="Enter the Budget"),
        FormField(
            name="preferredCallTime",
            label="Preferred Call Time",
            input_type="select",
            placeholder="Select time",
            options=[
                "Morning (9 AM - 12 PM)",
                "Afternoon (12 PM - 5 PM)",
                "Evening (5 PM - 8 PM)",
            ],
        ),
        _CAPTCHA,
    ],
)

FORMS = {form.key: form for form in (BUSINESS_FORM, CONTACT_FORM)}


class BusinessInquiry(BaseModel):
    """Business inquiry payload as it travels over the wire"""
    name: str
    phone: str
    email: str
    businessType: str
    packageInterested: str


class ContactRequest(BaseModel):
    """Contact request payload as it travels over the wire"""
    name: str
    email: str
    phone: str
    companyName: str
    website: str = ""
    serviceCategory: str
    packageTier: str
    budgetRange: str
    preferredCallTime: str


class SubmitResult(BaseModel):
    """Relay response"""
    success: bool
    forwarded: bool = False
    error: Optional[str] = None
