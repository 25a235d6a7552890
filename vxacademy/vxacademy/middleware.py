"""
Custom middleware to let certificate PDFs render inside the client's viewer frame
"""


class AllowPdfFramingMiddleware:
    """
    Remove the X-Frame-Options header from PDF responses only.
    Every other response keeps the clickjacking protection.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        if response.get('Content-Type', '').startswith('application/pdf') and 'X-Frame-Options' in response:
            del response['X-Frame-Options']

        return response
