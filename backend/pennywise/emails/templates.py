"""HTML templates for outgoing email. Values must be escaped before formatting."""

REMINDER_SUBJECT = "Reminder: {name} - Recurring Transaction Due"

REMINDER_HTML = """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #333;">Recurring Transaction Reminder</h2>

  <div style="background-color: #f8f9fa; padding: 20px; border-radius: 8px; margin: 20px 0;">
    <h3 style="color: #495057; margin-top: 0;">Transaction Details</h3>
    <p><strong>Name:</strong> {name}</p>
    <p><strong>Amount:</strong> {amount}</p>
    <p><strong>Category:</strong> {category}</p>
    <p><strong>Frequency:</strong> {frequency}</p>
    <p><strong>Next Due Date:</strong> {due_date}</p>
  </div>

  <div style="background-color: #e3f2fd; padding: 15px; border-radius: 8px; margin: 20px 0;">
    <p style="margin: 0; color: #1976d2;">
      <strong>Reminder:</strong> This is an automated reminder for your recurring transaction.
      Don't forget to add this transaction to your budget tracker!
    </p>
  </div>

  <div style="text-align: center; margin: 30px 0;">
    <a href="{dashboard_url}"
       style="background-color: #007bff; color: white; padding: 12px 24px; text-decoration: none; border-radius: 5px; display: inline-block;">
      Go to Dashboard
    </a>
  </div>

  <hr style="border: none; border-top: 1px solid #eee; margin: 30px 0;">
  <p style="color: #6c757d; font-size: 12px; text-align: center;">
    This is an automated email from your Budget Tracker. If you no longer want to receive these reminders,
    you can update your transaction settings in the dashboard.
  </p>
</div>
"""

REMINDER_TEXT = """Recurring Transaction Reminder

Name: {name}
Amount: {amount}
Category: {category}
Frequency: {frequency}
Next Due Date: {due_date}

Don't forget to add this transaction to your budget tracker: {dashboard_url}
"""

TEST_SUBJECT = "Test Email - Budget Tracker"

TEST_HTML = """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #333;">Email Configuration Test</h2>
  <p>This is a test email to verify your email configuration is working correctly.</p>
  <p>If you received this email, your recurring transaction reminders will work properly!</p>
</div>
"""

TEST_TEXT = """Email Configuration Test

If you received this email, your recurring transaction reminders will work properly!
"""
