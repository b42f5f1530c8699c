"""
utils/constants.py

Purpose: Centralized static content

- Validation error messages shown on forms
- SMS message templates
- Enumerations of sizes and statuses

(Prevents hardcoding across the codebase)
"""

# ============================================================
# ENUMERATIONS
# ============================================================

CAR_SIZES = ("small", "medium", "large", "extra_large")
MOTORCYCLE_SIZES = ("small", "large")

SERVICE_STATUSES = ("waiting", "in-progress", "payment-pending", "completed", "cancelled")

# ============================================================
# LIMITS
# ============================================================

PLATE_MIN_LENGTH = 3
PLATE_MAX_LENGTH = 8

MODEL_MIN_LENGTH = 2
MODEL_MAX_LENGTH = 100

# Sanity ceiling, not a business limit
MAX_COST = 100000

# ============================================================
# VALIDATION MESSAGES
# ============================================================

PLATE_REQUIRED = "License plate is required"
PLATE_TOO_SHORT = "License plate must be at least 3 characters long"
PLATE_TOO_LONG = "License plate is too long"

MOTORCYCLE_PLATE_REQUIRED = "Motorcycle license plate is required"
MOTORCYCLE_PLATE_TOO_SHORT = "Motorcycle plate must be at least 3 characters long"
MOTORCYCLE_PLATE_TOO_LONG = "Motorcycle plate is too long"

PLATE_MISSING_DASH = "Please include a dash (-) in the plate number"
PLATE_INVALID_PARTS = "Plate number must have valid characters before and after the dash"

PHONE_INVALID = (
    "Please enter a valid Philippine phone number starting with 09 or +639 "
    "followed by 9 digits"
)

CAR_MODEL_REQUIRED = "Car model is required"
CAR_MODEL_TOO_SHORT = "Car model must be at least 2 characters long"
CAR_MODEL_TOO_LONG = "Car model is too long (maximum 100 characters)"
CAR_MODEL_INVALID = "Car model contains invalid characters"

MOTORCYCLE_MODEL_REQUIRED = "Motorcycle model is required"
MOTORCYCLE_MODEL_TOO_SHORT = "Motorcycle model must be at least 2 characters long"
MOTORCYCLE_MODEL_TOO_LONG = "Motorcycle model is too long (maximum 100 characters)"
MOTORCYCLE_MODEL_INVALID = "Motorcycle model contains invalid characters"

COST_NOT_A_NUMBER = "Cost must be a valid number"
COST_NEGATIVE = "Cost cannot be negative"
COST_TOO_HIGH = "Cost seems unusually high. Please verify the amount"

CAR_SIZE_INVALID = "Please select a valid car size"
MOTORCYCLE_SIZE_INVALID = "Please select a valid motorcycle size"
STATUS_INVALID = "Please select a valid status"
UUID_INVALID = "Invalid ID format"

CREW_STATUS_REQUIRED = "Status is required for crew validation"
CREW_NOT_A_LIST = "Crew must be an array"
CREW_REQUIRED_IN_PROGRESS = (
    'At least one crew member must be assigned when status is "In Progress" '
    "and no package is selected."
)
SELECTED_CREW_NOT_A_LIST = "Selected crew must be an array"
BUSY_CREW_NOT_A_SET = "Busy crew IDs must be a Set"
CREW_BUSY = "Some selected crew members are currently busy. Please select different crew members."

STATUS_TRANSITION_INVALID = "Cannot change status from {previous} to {new}"

# ============================================================
# SMS
# ============================================================

SMS_SENT_MESSAGE = "SMS notification sent successfully"
SMS_FAILED_MESSAGE = "Failed to send SMS notification"
SMS_NOT_CONFIGURED = "SMS service not configured"

MISSING_COMPLETION_FIELDS = "Missing required fields: phoneNumber, customerName, plateNumber"
MISSING_STATUS_FIELDS = (
    "Missing required field(s): status, plateNumber, phoneNumber are all required."
)

COMPLETION_SMS_TEMPLATE = """🚗 Car Wash Complete!

Hi {customer_name},

Your vehicle ({plate_number}) has been completed at {completion_time}.{details}

Thank you for choosing our service!

- {signature}"""

# Status update templates; one is picked at random per message
STATUS_SMS_TEMPLATES = {
    "waiting": [
        "Hey! Your vehicle {plateNumber} is {queueNumber} in the queue. Appreciate your patience for waiting.",
        "Hi there! Your car {plateNumber} is currently {queueNumber} in line. Thanks for your patience!",
        "Hello! Vehicle {plateNumber} is {queueNumber} in our service queue. We'll get to you soon!",
        "Good day! Your vehicle {plateNumber} is {queueNumber} waiting to be serviced. Thank you for waiting patiently.",
        "Greetings! Your car {plateNumber} is {queueNumber} in our queue. We appreciate your understanding while you wait.",
    ],
    "in-progress": [
        "We are now working on your vehicle ({plateNumber}), you availed our {serviceType}.",
        "Great news! We've started servicing your vehicle {plateNumber} with our {serviceType} service.",
        "Your vehicle {plateNumber} is now being serviced! Our team is working on your {serviceType}.",
        "We're currently working on your car {plateNumber}. Your {serviceType} service is in progress.",
        "Good news! Your vehicle {plateNumber} is now under our care for the {serviceType} service.",
    ],
    "payment-pending": [
        "Our team leader just finished doing the final check on your vehicle. It's now ready for pickup and payment in our admin.",
        "Great news! Your vehicle has passed our final inspection and is ready for pickup. Please proceed to admin for payment.",
        "Your car is all set! Final quality check completed. Please come to our admin office for payment and pickup.",
        "Excellent! Your vehicle has been thoroughly checked and is ready. Kindly visit our admin for payment processing.",
        "Your vehicle service is complete! Final inspection done. Please head to our admin area for payment and pickup.",
    ],
    "completed": [
        "Thank you for visiting {shopName}, wish you liked our service! Take care driving!",
        "Thank you for choosing {shopName}! We hope you're satisfied with our service. Drive safely!",
        "It was a pleasure serving you at {shopName}! Hope you enjoyed our service. Safe travels!",
        "Thanks for trusting {shopName} with your vehicle! We hope you loved our service. Drive safe!",
        "Thank you for your business! We're glad we could serve you at {shopName}. Take care on the road!",
        "Appreciate your visit to {shopName}! Hope our service exceeded your expectations. Drive safely!",
    ],
}

STATUS_SMS_FALLBACK = "Status update for vehicle {plateNumber}"
