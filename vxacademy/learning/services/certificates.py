"""
Certificate issuing and PDF rendering
"""
import io
import logging
import time
from datetime import timedelta

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone
from reportlab.lib.pagesizes import landscape, letter
from reportlab.pdfgen import canvas

from learning.models import Certificate, UserProgress
from notifications.triggers import NotificationTriggers

logger = logging.getLogger(__name__)


class CourseNotCompleted(Exception):
    pass


class CertificateService:

    @staticmethod
    def build_number(user, course):
        return f"CERT-{user.pk}-{course.pk}-{int(time.time() * 1000)}"

    @staticmethod
    def generate(user, course):
        """
        Issue the certificate for a completed course, or return the one already issued.

        Raises:
            CourseNotCompleted: no completed UserProgress row for the course

        Returns:
            tuple: (Certificate, created)
        """
        existing = Certificate.objects.filter(user=user, course=course).first()
        if existing is not None:
            return existing, False

        if not UserProgress.objects.filter(user=user, course=course, completed=True).exists():
            raise CourseNotCompleted()

        issue_date = timezone.now()
        try:
            with transaction.atomic():
                certificate = Certificate.objects.create(
                    user=user,
                    course=course,
                    certificate_number=CertificateService.build_number(user, course),
                    issue_date=issue_date,
                    expiry_date=issue_date + timedelta(days=settings.VX_CERTIFICATE_VALIDITY_DAYS),
                    status='active',
                )
        except IntegrityError:
            return Certificate.objects.get(user=user, course=course), False

        logger.info(f"Issued certificate {certificate.certificate_number} to user {user.pk}")
        NotificationTriggers.on_certificate_earned(user, certificate)
        return certificate, True

    @staticmethod
    def render_pdf(certificate):
        """Render a single landscape page and return the PDF bytes"""
        buffer = io.BytesIO()
        width, height = landscape(letter)
        c = canvas.Canvas(buffer, pagesize=(width, height))
        c.setTitle(f"Certificate {certificate.certificate_number}")

        c.setLineWidth(4)
        c.rect(30, 30, width - 60, height - 60)
        c.setLineWidth(1)
        c.rect(40, 40, width - 80, height - 80)

        c.setFont("Helvetica-Bold", 32)
        c.drawCentredString(width / 2, height - 130, "Certificate of Completion")

        c.setFont("Helvetica", 14)
        c.drawCentredString(width / 2, height - 180, "This certifies that")

        c.setFont("Helvetica-Bold", 26)
        c.drawCentredString(width / 2, height - 225, certificate.user.name or certificate.user.username)

        c.setFont("Helvetica", 14)
        c.drawCentredString(width / 2, height - 270, "has successfully completed the course")

        c.setFont("Helvetica-Bold", 20)
        c.drawCentredString(width / 2, height - 310, certificate.course.name)

        c.line(120, 150, width - 120, 150)
        c.setFont("Helvetica", 11)
        c.drawString(120, 130, f"Certificate No: {certificate.certificate_number}")
        c.drawString(120, 112, f"Issued: {certificate.issue_date:%d %B %Y}")
        if certificate.expiry_date:
            c.drawRightString(width - 120, 112, f"Valid until: {certificate.expiry_date:%d %B %Y}")
        c.drawRightString(width - 120, 130, "VX Academy")

        c.showPage()
        c.save()
        return buffer.getvalue()
