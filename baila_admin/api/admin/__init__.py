# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Admin API routes package.

Modules:
    auth: Admin login.
    students: Student roster and payment updates.
    sections: Class sections with occupancy.
    enrollment: Moving students between sections.
    waitlist: Waitlist entries.
    reports: Summary, search, mail links and roster exports.
"""

from fastapi import APIRouter

from baila_admin.api.admin import auth, enrollment, reports, sections, students, waitlist

router = APIRouter(prefix="/api/admin")

router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
router.include_router(students.router, prefix="/students", tags=["Students"])
router.include_router(sections.router, prefix="/sections", tags=["Sections"])
router.include_router(enrollment.router, prefix="/enrollment", tags=["Enrollment"])
router.include_router(waitlist.router, prefix="/waitlist", tags=["Waitlist"])
router.include_router(reports.router, prefix="/reports", tags=["Reports"])

__all__ = ["router"]
