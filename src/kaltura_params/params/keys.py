KS_KEY = "ks"
LANGUAGE_KEY = "language"
REQUEST_ID_KEY = "x-kaltura-session-id"
CURRENCY_KEY = "currency"
USER_ID_KEY = "userId"
RESPONSE_PROFILE_KEY = "responseProfile"
