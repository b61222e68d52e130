# app/models/project.py
from typing import Any, Union

from pydantic import Field

from app.models.base import DocumentModel, LooseDatetime


class ProjectModel(DocumentModel):
    COLLECTION = "Project"
    BUSINESS_KEY = "projectId"
    LABEL = "projects"

    projectId: Union[int, str]
    projectName: Any = None
    clientName: Any = None
    clientIndustry: Any = None
    startDate: LooseDatetime = None
    endDate: LooseDatetime = None
    leadByEmpId: Any = None
    sponsorEmpId: Any = None
    contactPerson: Any = None
    contactNo: Any = None
    emailId: Any = None
    contactTitle: Any = None
    contactNotes: Any = None
    overview: Any = None
    scope: Any = None
    successMetrics: Any = None
    status: Any = "draft"
    statusReason: Any = None
    statusHistory: Any = None
    timeline: Any = None
    milestones: Any = None
    categories: Any = Field(default_factory=list)
    tags: Any = Field(default_factory=list)
    focusAreas: Any = Field(default_factory=list)
    blockers: Any = None
    risks: Any = None
    riskRegister: Any = None
    budget: Any = None
    financials: Any = None
    resourcesPlan: Any = None
    readinessChecklist: Any = None
    readinessScore: Any = None
    approvalStatus: Any = "draft"
    approvalRequestedAt: LooseDatetime = None
    approvalRequestedBy: Any = None
    approvalResolvedAt: LooseDatetime = None
    approvalResolvedBy: Any = None
    approvalReason: Any = None
    approvalNotes: Any = None
    reviewerComments: Any = None
    progress: Any = None
    health: Any = None
    documents: Any = None
    externalLinks: Any = None
    aiGeneratedInsights: Any = None
    cmsContentRefs: Any = Field(default_factory=list)
    lastSyncedAt: LooseDatetime = None
    stageGate: Any = None
    governance: Any = None
    communicationPlan: Any = None
    archivedAt: LooseDatetime = None
